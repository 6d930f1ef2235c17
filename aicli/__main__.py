"""
Run aicli with `python -m aicli`, picking up OPENAI_API_KEY from a local `.env`.
"""
from dotenv import load_dotenv
load_dotenv()

from .main import main

if __name__ == "__main__":
    main()
