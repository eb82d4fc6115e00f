"""Adapters (infrastructure) for CSLMATCH.

Provide concrete implementations of the collaborator interfaces (package
filesystem, host environment) for local disks, tests and embedding hosts.

Dependency rule: may import `cslmatch.interfaces`; the domain must not import
this package.
"""
