"""Entrypoints (inbound adapters) for CSLMATCH.

Expose the application to the outside world: currently the ``cslmatch`` CLI.
Parse and validate inputs, call the service layer, and present results.

Dependency rule: may import `cslmatch.service_layer`; adapters are only wired
here, never imported by inner layers.
"""
