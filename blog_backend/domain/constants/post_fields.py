"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    TITLE = "title"
    CONTENT = "content"
    CREATED_AT = "created_at"
    EDITED = "edited"
    AUTHOR_ID = "author_id"
    
    # Aggregation outputs
    AUTHOR = "author"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
