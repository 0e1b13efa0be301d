"""Run artifact layout and writers."""
