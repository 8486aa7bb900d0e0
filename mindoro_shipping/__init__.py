"""
Mindoro shipping calculator.

Client-side preview of the J&T Oriental Mindoro shipping fee, served as-is by
the backend twin so both sides compute the same number.
"""
