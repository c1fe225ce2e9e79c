"""Seller sales performance analytics: revenue, profit, ranking and bonuses."""

from sales_analytics.engine import analyze_sales_data
from sales_analytics.errors import InvalidInputError, MissingConfigurationError, SalesAnalyticsError

__all__ = ['analyze_sales_data', 'InvalidInputError', 'MissingConfigurationError', 'SalesAnalyticsError']
