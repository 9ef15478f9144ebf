from restaurant_api.api.logs.models.model_log import LogModel

__all__ = ["LogModel"]
