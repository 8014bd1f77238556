"""Clinic scheduling and billing domain core."""
