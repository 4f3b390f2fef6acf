"""Domain package for joint-interest billing and cash-call rules."""
