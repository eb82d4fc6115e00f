"""CSLMATCH test suite.

Folder taxonomy
- unit/     : Isolated, fast checks of a single module/class/function. Package
              libraries are built in an `InMemoryFileSystem`; nothing touches disk
              except the local filesystem adapter tests.
- e2e/      : The ``cslmatch`` CLI invoked through Click's `CliRunner` against
              a library written to a temporary folder.
- fixtures/ : Shared fixtures and sample reference documents (no tests here).

Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
