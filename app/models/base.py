from sqlalchemy.orm import DeclarativeBase

# Range of the Integer columns used for keys and years
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


class Base(DeclarativeBase):
    pass
