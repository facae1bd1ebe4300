from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _

class CoreConfig(AppConfig):
    name = "stockroom.core"
    verbose_name = _("Core")
