"""agneby_shared — settings, vocabularies, models and logging for the Agneby Tiassa back office."""

__version__ = "0.1.0"
