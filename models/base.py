from sqlalchemy.orm import declarative_base

# Shared declarative base for every mapped table
Base = declarative_base()
