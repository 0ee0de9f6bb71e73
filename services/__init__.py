"""Task list services: storage, controller, API stub client and remote source."""
