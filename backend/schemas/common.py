from pydantic import BaseModel


# Plain acknowledgement returned by delete endpoints
class MessageResponse(BaseModel):
    message: str


# Acknowledgement returned when a record is inserted
class CreatedResponse(MessageResponse):
    id: int
