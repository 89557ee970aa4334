"""Infrastructure modules for the translation converter.

Centralized infrastructure components:
- configuration: Settings management (settings, ConverterSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results (OperationResult, OperationStatus)
"""
