"""
Feature modules for the LaunchKit auth backend.

- auth: backend client, service, guards, validation and routes
- hooks: per-action state (loading, error, success) over the auth backend
- flows: forms and the multi-step verification and password reset flows

Modules communicate through interfaces, not concrete implementations.
"""
