from django.apps import AppConfig


class StatsConfig(AppConfig):
    name = "modules.stats"
    label = "stats"
