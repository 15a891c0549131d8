from django.apps import AppConfig


class AgentsConfig(AppConfig):
    name = "modules.agents"
    label = "agents"
