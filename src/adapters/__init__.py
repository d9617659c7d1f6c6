"""Adaptadores de I/O: cliente HTTP y fachada del servidor de juego."""
