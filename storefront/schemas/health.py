"""Pydantic schemas for the health endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    application: str
    version: str


class DatabaseHealth(BaseModel):
    status: str
    dialect: str


class DetailedHealthResponse(HealthResponse):
    database: DatabaseHealth


class ProbeResponse(BaseModel):
    status: str
    timestamp: datetime
    message: str
