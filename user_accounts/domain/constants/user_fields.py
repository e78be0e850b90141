"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    GENDER = "gender"
    DOB = "dob"
    EMAIL = "email"
    PASSWORD = "password"
    HASHED_PASSWORD = "hashed_password"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
