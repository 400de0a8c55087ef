"""Scan report output."""

from .json_report import render_json, write_json_report

__all__ = ["render_json", "write_json_report"]
