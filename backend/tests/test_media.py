"""
画像・動画URL解決のテスト
"""
from rhyme_quiz.core.settings import Settings
from rhyme_quiz.quiz.media import resolve_image_url, resolve_video_url


class TestResolveImageUrl:
    """resolve_image_url のテスト"""

    def test_default_is_local(self):
        assert resolve_image_url("tora", Settings()) == "/images/tora.jpg"

    def test_local(self):
        cfg = Settings(IMAGE_PROVIDER="local")
        assert resolve_image_url("umikaze", cfg) == "/images/umikaze.jpg"

    def test_cloudflare_r2(self):
        cfg = Settings(IMAGE_PROVIDER="cloudflare-r2", CLOUDFLARE_R2_PUBLIC_URL="pub-abc123.r2.dev")
        assert resolve_image_url("tora", cfg) == "https://pub-abc123.r2.dev/tora.jpg"

    def test_cloudinary(self):
        cfg = Settings(IMAGE_PROVIDER="cloudinary", CLOUDINARY_CLOUD_NAME="mycloud")
        assert resolve_image_url("tora", cfg) == "https://res.cloudinary.com/mycloud/image/upload/tora.jpg"

    def test_unknown_provider_falls_back_to_local(self):
        cfg = Settings(IMAGE_PROVIDER="s3")
        assert resolve_image_url("tora", cfg) == "/images/tora.jpg"

    def test_empty_key(self):
        assert resolve_image_url("", Settings()) == ""

    def test_reads_environment(self, monkeypatch):
        """環境変数から作った設定でも切り替わる"""
        monkeypatch.setenv("IMAGE_PROVIDER", "cloudflare-r2")
        monkeypatch.setenv("CLOUDFLARE_R2_PUBLIC_URL", "images.example.com")
        assert resolve_image_url("tora", Settings()) == "https://images.example.com/tora.jpg"


class TestResolveVideoUrl:
    """resolve_video_url のテスト"""

    def test_default_is_local(self):
        assert resolve_video_url("abc123", Settings()) == "/video/abc123.mp4"

    def test_cloudinary(self):
        cfg = Settings(VIDEO_PROVIDER="cloudinary", CLOUDINARY_CLOUD_NAME="mycloud")
        assert resolve_video_url("abc123", cfg) == (
            "https://res.cloudinary.com/mycloud/video/upload/abc123.mp4"
        )

    def test_bunny(self):
        cfg = Settings(VIDEO_PROVIDER="bunny", BUNNY_HOSTNAME="myzone.b-cdn.net")
        assert resolve_video_url("abc123", cfg) == "https://myzone.b-cdn.net/abc123.mp4"

    def test_long_key(self):
        key = "20260226_1254_01kjb86c8mf86rdf15zcrvc52b"
        assert resolve_video_url(key, Settings(VIDEO_PROVIDER="local")) == f"/video/{key}.mp4"
