"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (write operations), e.g.
  ProcessAgreementEvent for Adobe Sign callbacks
- events/: Publishers that build domain events after a change was saved

The application layer orchestrates domain logic but contains no business rules.
"""
