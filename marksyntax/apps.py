from django.apps import AppConfig


class MarksyntaxConfig(AppConfig):
    name = 'marksyntax'
    verbose_name = 'Extended markdown syntax'
