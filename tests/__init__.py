"""CONCORDANCE test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior every Correspondence variant must share.

General guidance
- Keep unit fast and deterministic (no real I/O beyond tmp_path).
- Contract parametrizes the shipped variants through the `variant` fixture.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
