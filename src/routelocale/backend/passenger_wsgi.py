"""WSGI entrypoint for serving the localized route table under Passenger."""

from routelocale.backend.app import create_app

# Passenger expects a module-level variable named ``application``.
application = create_app()
