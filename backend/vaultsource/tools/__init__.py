"""Helpers shared by datasource implementations."""
