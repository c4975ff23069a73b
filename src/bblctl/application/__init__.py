"""Application layer — invocation types and the command dispatcher."""

from bblctl.application.app import App
from bblctl.application.configuration import GlobalOptions, Invocation

__all__ = ["App", "GlobalOptions", "Invocation"]
