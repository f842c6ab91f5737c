"""
newcomponent test suite
=======================

Test Modules
------------
- test_models.py: Configuration model and enums
- test_naming.py: Name validation and case formatting
- test_config.py: Layered configuration resolution
- test_templating.py: Template loading and rendering
- test_generator.py: Scaffold pipeline and filesystem writes
- test_cli.py: Command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=src/newcomponent

    # Run specific test class
    pytest tests/test_generator.py::TestCreateComponent
"""
