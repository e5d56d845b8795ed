"""Packagist adapter."""
