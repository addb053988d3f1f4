import os

# Point the app at a throwaway database before backend modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_quotations.db")
