"""
Client application logic, independent of any UI toolkit.

Responsibilities:
- Hold the transient search form (preferences, location, filters, results).
- Assemble the natural-language prompt sent through the proxy.
- Extract restaurants from the model's free-text reply.
- Sort results and build map links for the result cards.
"""
