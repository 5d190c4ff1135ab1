# Avoid importing the browser engines at top-level; they pull in Playwright
__all__ = ["RotationRunner", "RotateConfig", "Credentials"]

__version__ = "0.1.0"

def __getattr__(name):
    if name == "RotationRunner":
        from .automation.runner import RotationRunner
        return RotationRunner
    if name == "RotateConfig":
        from .config import RotateConfig
        return RotateConfig
    if name == "Credentials":
        from .core.models import Credentials
        return Credentials
    raise AttributeError(name)
