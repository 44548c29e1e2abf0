"""Integrator, sample loop, tone mapping and image output."""
