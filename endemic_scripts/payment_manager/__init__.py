"""
Payment Manager
===============

EndemicPaymentManager proxy deployment.
"""
