"""Visualization layer: matplotlib renderers for survey maps."""

from subsurvey.viz.render import render_survey_map

__all__ = ["render_survey_map"]
