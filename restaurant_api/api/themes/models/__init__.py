from restaurant_api.api.themes.models.model_theme import ThemeModel

__all__ = ["ThemeModel"]
