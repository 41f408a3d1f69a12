from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UploadStatus = Literal["stored", "rejected_extension", "rejected_empty"]


class FileDescriptor(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    document_name: str = Field("", alias="documentName")
    document_type: str = Field("", alias="documentType")
    document_url: str = Field("", alias="documentUrl")
    status: UploadStatus

    @property
    def stored(self) -> bool:
        return self.status == "stored"

    @classmethod
    def rejected(cls, status: UploadStatus) -> "FileDescriptor":
        # document fields stay empty, only the status says why
        return cls(status=status)
