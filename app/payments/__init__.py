"""
Payments app for gateway integrations.

This app handles:
- Rendering gateway checkout buttons for storefront orders
- Talking to the Paylike API (fetch and capture transactions)
- Verifying and dispatching payment notifications
- Logging every notification for audit and duplicate detection

Related apps:
    - shop: Order and Payment models the gateways settle against

Usage:
    from payments.gateways import get_gateway

    gateway = get_gateway("paylike")
    transaction = gateway.get_transaction(txn_id)
"""
