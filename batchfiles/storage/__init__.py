from .filesystem import FileSystemStorage  # noqa: F401
from .triggers import TriggerWriter  # noqa: F401
