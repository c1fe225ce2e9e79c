class SalesAnalyticsError(Exception):
    """Base exception for the sales analytics engine"""
    pass

class InvalidInputError(SalesAnalyticsError):
    """A required dataset collection is missing, malformed or empty"""
    pass

class MissingConfigurationError(SalesAnalyticsError):
    """Neither a revenue nor a bonus strategy was supplied"""
    pass
