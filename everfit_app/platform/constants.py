SERVICE_NAME = "everfit-app"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

WELCOME_MESSAGE = "Welcome to Everfit Application!"
HEALTHY_STATUS = "healthy"
