"""PATTERNBOOK test suite.

Folder taxonomy
- unit/      : Fast checks of one module: pattern examples, the framework
               container and facades, the post model and the CLI helpers.
- e2e/       : The `patternbook` command invoked through Click's CliRunner.
- fixtures/  : Shared fixtures (no tests here).

General guidance
- Unit tests touch the filesystem only through `tmp_path`.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, e2e, property
"""
