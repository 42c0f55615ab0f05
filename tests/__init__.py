"""
Test suite for PyUpsample package.

This test suite covers:
- Import tests for the package and its submodules
- Unit tests for the border extension, the bilinear and six-tap kernels,
  input validation, file helpers and the CLI
- Integration tests for file-to-file upsampling workflows

Run with: pytest
"""
