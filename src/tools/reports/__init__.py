"""Offline reports over solve event logs."""
