import io
import wave

from app.utils import to_data_url


def pcm_to_wav(pcm_data: bytes, channels: int = 1, rate: int = 24000, sample_width: int = 2) -> bytes:
    """Wraps raw little-endian PCM frames from the TTS model in a WAV container."""
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as writer:
        writer.setnchannels(channels)
        writer.setsampwidth(sample_width)
        writer.setframerate(rate)
        writer.writeframes(pcm_data)
    return buffer.getvalue()


def pcm_to_wav_data_url(pcm_data: bytes, channels: int = 1, rate: int = 24000, sample_width: int = 2) -> str:
    return to_data_url(pcm_to_wav(pcm_data, channels, rate, sample_width), "audio/wav")
