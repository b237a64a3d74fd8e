"""RTSP 1.0 building blocks: message serialisation, SDP, request dispatch, RTP and H.264/H.265 NAL packetisation."""

__version__ = "0.1.0"