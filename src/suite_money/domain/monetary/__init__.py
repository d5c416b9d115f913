"""Monetary domain package.

This package contains the Currency descriptor, the immutable Money object and the errors
raised when Money objects of different currencies or calculators are combined.
"""
