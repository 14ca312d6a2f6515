"""Credit packages. Purchases are simulated; no payment is taken."""

from __future__ import annotations

from typing import Any, Dict

from promptforge.views.base import INVALID, OK, BaseView

PLANS = [
    {"credits": 50, "price": 5, "popular": False},
    {"credits": 120, "price": 10, "popular": True},
    {"credits": 300, "price": 20, "popular": False},
]


class StoreView(BaseView):
    name = "store"

    def purchase(self, credits: int) -> str:
        plan = next((p for p in PLANS if p["credits"] == credits), None)
        if plan is None:
            return INVALID
        self.store.add_credits(plan["credits"])
        self.ui.show_toast(f"{plan['credits']} credits added!")
        return OK

    def render(self) -> Dict[str, Any]:
        return {"plans": PLANS, "credits": self.store.state.user_credits}
