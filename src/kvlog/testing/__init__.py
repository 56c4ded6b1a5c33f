"""Testing – fakes and property-based strategies for kvlog loggers."""
