"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- document_store/: Sanity HTTP API (contract records, assets, activity log)
- email/: Resend transactional email and audiences
- chat/: Slack incoming webhook
- events/: In-memory event bus and the handlers subscribed to it
- logging/, clock/, http/: Shared plumbing

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
