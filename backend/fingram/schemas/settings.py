"""Pydantic models for site-wide display settings."""

from pydantic import BaseModel


class SettingsRead(BaseModel):
    site_name: str
    currency_symbol: str
    locale: str


class SettingsUpdate(BaseModel):
    site_name: str | None = None
    currency_symbol: str | None = None
    locale: str | None = None
