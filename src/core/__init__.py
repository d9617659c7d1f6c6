"""Core: configuración, errores, dominio y contratos."""
