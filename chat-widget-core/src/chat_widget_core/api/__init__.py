from chat_widget_core.api.app import create_app

__all__ = ["create_app"]
