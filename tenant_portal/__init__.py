"""
Tenant Portal - subdomain-based tenant resolution service
"""

__version__ = "1.0.0"
