"""Creative idea flow for the activity currently open in the detail view.

Single slot: at most one activity is open. Every ``open`` takes a new request
token and a resolution is applied only while its token is still current, so
a request that resolves after ``close`` or after a newer ``open`` changes
nothing.
"""

import sys

from lpb.state import Activity, IdeaFlowState, closed_idea_state

IDEA_ERROR_MESSAGE = "Gagal mendapatkan ide dari AI. Silakan coba lagi."


class IdeaRequestFlow:
    def __init__(self, client):
        self.client = client
        self.state: IdeaFlowState = closed_idea_state()
        self._token = 0

    async def open(self, activity: Activity, class_info: str) -> None:
        """Select ``activity`` and request creative ideas for it."""
        self._token += 1
        token = self._token
        self.state = {
            "phase": "opening",
            "open": True,
            "selected_activity": activity,
            "results": [],
            "running": True,
            "error_message": None,
        }

        try:
            ideas = await self.client.generate_creative_ideas(
                activity.get("title", ""),
                activity.get("description", ""),
                class_info,
            )
        except Exception as exc:
            if token != self._token:
                return
            print(f"[LPB] Error generating ideas: {exc!r}", file=sys.stderr)
            self.state = {
                **self.state,
                "phase": "errored",
                "results": [],
                "running": False,
                "error_message": IDEA_ERROR_MESSAGE,
            }
            return

        if token != self._token:
            return
        self.state = {**self.state, "phase": "loaded", "results": list(ideas), "running": False}

    def close(self) -> None:
        """Return to closed, dropping selection, results and error."""
        self._token += 1
        self.state = closed_idea_state()
