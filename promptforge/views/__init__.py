"""View controllers, one per named view."""

from .base import ActionBusy, BaseView
from .chat import ChatView
from .code_builder import CodeBuilderView
from .dashboard import DashboardView
from .generator import GeneratorView
from .history import HistoryView
from .landing import LandingView
from .prompt_builder import PromptBuilderView
from .store import StoreView

VIEW_CLASSES = {
    view.name: view
    for view in (
        LandingView,
        DashboardView,
        ChatView,
        PromptBuilderView,
        CodeBuilderView,
        GeneratorView,
        HistoryView,
        StoreView,
    )
}

__all__ = ["ActionBusy", "BaseView", "VIEW_CLASSES"]
