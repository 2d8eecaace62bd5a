"""Package metadata and naming constants."""

PACKAGE_NAME = "design-patterns-catalogue"
DESCRIPTION = "Runnable catalogue of the classic Creational, Structural and Behavioral design patterns"
CONSOLE_SCRIPT = "design-patterns"
