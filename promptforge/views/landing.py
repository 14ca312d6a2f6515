"""Marketing landing page and the mocked sign-in flow."""

from __future__ import annotations

from typing import Any, Dict, Optional

from promptforge.models import SIGNUP_CREDITS, User
from promptforge.views.base import INVALID, OK, BaseView

DEMO_USER = User(name="Demo User", email="demo@example.com")

AUTH_FORMS = {
    "login": {"title": "Welcome Back", "submitLabel": "Login", "fields": ["email", "password"]},
    "signup": {
        "title": "Create Account",
        "submitLabel": f"Sign Up & Get {SIGNUP_CREDITS} Credits",
        "fields": ["name", "email", "password"],
    },
}

FEATURES = [
    {
        "title": "Intelligent Prompt Builder",
        "body": "Craft detailed project prompts with AI-powered suggestions for audience, "
        "features, tech stack, and more.",
    },
    {
        "title": "Multi-Framework Code Generation",
        "body": "Generate clean code in HTML, React, and Vue, from quick snippets to full applications.",
    },
    {
        "title": "Collaborative AI Chat",
        "body": "Brainstorm ideas, debug code, and get instant answers with an assistant whose "
        "persona, tone, and creativity you control.",
    },
]

PRICING = [
    {"name": "Hobbyist", "price": "Free", "perks": [f"{SIGNUP_CREDITS} Free Credits", "Basic AI Models"]},
    {
        "name": "Pro",
        "price": "$10/120 credits",
        "popular": True,
        "perks": ["120 Credits", "Advanced AI Models", "Save & Manage Unlimited Prompts", "Priority Support"],
    },
    {
        "name": "Enterprise",
        "price": "Custom",
        "perks": ["Custom Credit Allotments", "Team Management & Billing", "On-premise Options", "Dedicated Support"],
    },
]

TESTIMONIALS = [
    {
        "quote": "I can go from a client brief to a working prototype in the same afternoon.",
        "author": "Sarah L., Freelance Web Developer",
    },
    {
        "quote": "The prompt builder forces me to think through the project requirements properly.",
        "author": "Mike R., Senior Frontend Engineer",
    },
    {
        "quote": "I can experiment with different frameworks and see best practices in action instantly.",
        "author": "Chloe T., Computer Science Student",
    },
]


class LandingView(BaseView):
    name = "landing"

    def open_auth(self, form_type: str) -> str:
        form = AUTH_FORMS.get(form_type)
        if form is None:
            return INVALID
        self.ui.show_modal("auth", formType=form_type, **form)
        return OK

    def submit_auth(self, name: Optional[str] = None, email: Optional[str] = None) -> str:
        """Any submitted form succeeds; blanks fall back to the demo account."""
        user = User(
            name=(name or "").strip() or DEMO_USER.name,
            email=(email or "").strip() or DEMO_USER.email,
        )
        self.store.login(user)
        self.ui.hide_modal()
        return OK

    def contact_sales(self) -> str:
        self.ui.show_toast("Contacting sales!")
        return OK

    def render(self) -> Dict[str, Any]:
        return {
            "headline": "Forge The Future of Code",
            "features": FEATURES,
            "pricing": PRICING,
            "testimonials": TESTIMONIALS,
            "authForms": sorted(AUTH_FORMS),
        }
