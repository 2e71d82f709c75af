from django.apps import AppConfig


class SafrasConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'safras'
    verbose_name = 'Gestão de Safras'
