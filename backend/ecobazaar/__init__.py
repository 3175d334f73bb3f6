"""
EcoBazaar - Backend API
Storefront backend with carbon-impact scoring and marketplace analytics
"""
