"""Core application services: paths, configuration, logging, and theming."""
