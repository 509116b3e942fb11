"""LEASING test suite.

Folder taxonomy
- unit/         : One module at a time; domain objects, handlers on an in-memory bus.
- integration/  : The wired application from `bootstrap()` down to the repositories.
- e2e/          : The ``leasing`` command driven through Click's CliRunner.
- helpers/      : Shared sample data (no tests here).

Markers (unit, integration, e2e) are applied per folder by the local conftest.
Hypothesis tests carry @pytest.mark.property on top of their folder marker.
"""
