"""
画像・動画のURL解決

【初心者向け】
- IMAGE_PROVIDER / VIDEO_PROVIDER の値で配信元を切り替える
  - 画像: local / cloudflare-r2 / cloudinary
  - 動画: local / cloudinary / bunny
- 呼び出しのたびに設定を読んで、対応するURL組み立て関数を選ぶだけ
- 知らない値が設定されていたら local 扱い
"""
import logging
from typing import Callable, Optional

from rhyme_quiz.core.settings import Settings, settings

# ロガー設定
logger = logging.getLogger(__name__)


# 画像URLの組み立て方（新しいプロバイダーはここに追加するだけ）
IMAGE_STRATEGIES: dict[str, Callable[[str, Settings], str]] = {
    "local": lambda key, cfg: f"/images/{key}.jpg",
    "cloudflare-r2": lambda key, cfg: f"https://{cfg.cloudflare_r2_public_url}/{key}.jpg",
    "cloudinary": lambda key, cfg: (
        f"https://res.cloudinary.com/{cfg.cloudinary_cloud_name}/image/upload/{key}.jpg"
    ),
}

VIDEO_STRATEGIES: dict[str, Callable[[str, Settings], str]] = {
    "local": lambda key, cfg: f"/video/{key}.mp4",
    "cloudinary": lambda key, cfg: (
        f"https://res.cloudinary.com/{cfg.cloudinary_cloud_name}/video/upload/{key}.mp4"
    ),
    "bunny": lambda key, cfg: f"https://{cfg.bunny_hostname}/{key}.mp4",
}


def _select(name: str, strategies: dict[str, Callable[[str, Settings], str]], kind: str) -> str:
    provider = (name or "local").lower()
    if provider not in strategies:
        logger.warning(f"未知の{kind}プロバイダー: {name}。local を使用します")
        return "local"
    return provider


def get_image_provider(config: Optional[Settings] = None) -> str:
    cfg = config or settings
    return _select(cfg.image_provider, IMAGE_STRATEGIES, "画像")


def get_video_provider(config: Optional[Settings] = None) -> str:
    cfg = config or settings
    return _select(cfg.video_provider, VIDEO_STRATEGIES, "動画")


def resolve_image_url(key: str, config: Optional[Settings] = None) -> str:
    """
    画像キーからURLを作る（キーが空なら空文字）

    Args:
        key: 画像キー（例: tora）
        config: 設定（未指定ならグローバル設定）
    """
    if not key:
        return ""
    cfg = config or settings
    return IMAGE_STRATEGIES[get_image_provider(cfg)](key, cfg)


def resolve_video_url(key: str, config: Optional[Settings] = None) -> str:
    """動画キーからURLを作る（キーが空なら空文字）"""
    if not key:
        return ""
    cfg = config or settings
    return VIDEO_STRATEGIES[get_video_provider(cfg)](key, cfg)

