"""Adapters turning exported contribution data into timelines."""

from ghmetrics.adapters.graphql import TimelineLoadError, load_timeline, parse_timeline

__all__ = ["TimelineLoadError", "load_timeline", "parse_timeline"]
