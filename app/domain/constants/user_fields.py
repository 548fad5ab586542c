"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NICKNAME = "nickname"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    PASSWORD = "password"
    EMAIL = "email"
    COUNTRY = "country"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    
    # Query parameters accepted as equality filters when listing users
    FILTERABLE = (ID, NICKNAME, FIRST_NAME, LAST_NAME, EMAIL, COUNTRY)
