from .admission import BREAKING_NEWS_MEDIA, IMAGE_ONLY, AdmissionPolicy
from .gateway import CloudinaryGateway, UploadGateway
from .staging import StagedFile, sanitize_filename, stage_upload
from .uploader import Attachment, MediaUploader

__all__ = [
    "AdmissionPolicy",
    "Attachment",
    "BREAKING_NEWS_MEDIA",
    "CloudinaryGateway",
    "IMAGE_ONLY",
    "MediaUploader",
    "StagedFile",
    "UploadGateway",
    "sanitize_filename",
    "stage_upload",
]
