"""Utility helpers for appkey."""
