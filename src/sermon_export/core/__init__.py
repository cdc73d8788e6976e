"""Core assembly and export logic for Sermon Export."""

from sermon_export.core.models import ExportDescriptor, PlanData
from sermon_export.core.assembler import DocumentAssembler, ExportError
from sermon_export.core.exporter import PlanExporter

__all__ = [
    "ExportDescriptor",
    "PlanData",
    "DocumentAssembler",
    "ExportError",
    "PlanExporter",
]
