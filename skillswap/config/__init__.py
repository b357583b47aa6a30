from skillswap.config.settings import settings

__all__ = ["settings"]
