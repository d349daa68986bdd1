
from dotenv import load_dotenv

# Load environment variables from .env as early as possible so settings read
# in the application lifespan see the configured values.
load_dotenv()
