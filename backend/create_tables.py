from db import engine, Base, AUTH_SCHEMA
import models #Ensure that your models are imported so they register with Base


def create_tables(bind=engine):
    # the identity provider owns its users table; only create it when running without one (sqlite/dev)
    tables = [t for t in Base.metadata.sorted_tables if not (AUTH_SCHEMA and t.schema == AUTH_SCHEMA)]
    Base.metadata.create_all(bind=bind, tables=tables)


if __name__ == "__main__":
    create_tables()

#Base.metadata, keep track of all meta data  associated with your models
#create_all: genrate database tables if they dont exist.
