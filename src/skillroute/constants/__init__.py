"""Constant tables shared across skillroute modules."""
