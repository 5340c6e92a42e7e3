from .video_message_handler import VideoMessageHandler

__all__ = ["VideoMessageHandler"]
