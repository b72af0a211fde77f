from django.apps import AppConfig


class ChatpollConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "chatpoll"
    verbose_name = "Chat Poll"
