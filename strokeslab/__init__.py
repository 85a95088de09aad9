"""Strokes gained and handicap analytics for scorecard data."""
