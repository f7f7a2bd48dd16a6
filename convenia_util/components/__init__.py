from .jinja_env import install, build_env

__all__ = ["install", "build_env"]
