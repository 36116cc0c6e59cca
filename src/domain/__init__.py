"""Domain layer - Pure business logic.

This layer contains the webinar entity, the acting user, webinar error
constants, and the protocols (ports) implemented by infrastructure. It has NO
dependencies on any framework.

Structure:
- entities/: Domain entities and webinar rule constants
- errors/: Webinar error messages and error factories
- protocols/: Repository, generator, and logger interfaces
"""
