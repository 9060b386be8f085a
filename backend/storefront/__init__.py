"""
Storefront - dashboard and product search backend
"""
