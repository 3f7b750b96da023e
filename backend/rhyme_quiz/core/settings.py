"""
アプリケーション設定（環境変数・定数の一元管理）

【初心者向け】
- Pydantic Settings: 環境変数や.envを読んで型付きで扱うための仕組み
- ここで定義した値は rhyme_quiz.core.settings.settings から参照できる
- 主な分類: CORS, 問題データ, メディア配信（画像/動画）, ログ
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """
    アプリケーション設定クラス
    環境変数（または.env）の値が自動でここにマッピングされる
    """

    # CORS設定
    cors_origins: List[str] = ["http://localhost:3000"]

    # 問題データ
    quiz_data_path: str | None = Field(
        default=None,
        alias="QUIZ_DATA_PATH",
        description="問題データJSONのパス（未指定ならパッケージ同梱のquizzes.json）"
    )
    quiz_repository: str = Field(
        default="json",
        alias="QUIZ_REPOSITORY",
        description="問題リポジトリの種類（現状は json のみ）"
    )
    quiz_shuffle_choices: bool = Field(
        default=True,
        alias="QUIZ_SHUFFLE_CHOICES",
        description="出題時に選択肢をシャッフルするか"
    )

    # 画像配信設定
    image_provider: str = Field(
        default="local",
        alias="IMAGE_PROVIDER",
        description="画像の配信元（local / cloudflare-r2 / cloudinary）"
    )
    cloudflare_r2_public_url: str = Field(
        default="",
        alias="CLOUDFLARE_R2_PUBLIC_URL",
        description="Cloudflare R2 の公開ホスト名（例: pub-xxxxx.r2.dev）"
    )
    cloudinary_cloud_name: str = Field(
        default="",
        alias="CLOUDINARY_CLOUD_NAME",
        description="Cloudinary のクラウド名"
    )

    # 動画配信設定
    video_provider: str = Field(
        default="local",
        alias="VIDEO_PROVIDER",
        description="動画の配信元（local / cloudinary / bunny）"
    )
    bunny_hostname: str = Field(
        default="",
        alias="BUNNY_HOSTNAME",
        description="Bunny Stream のホスト名（例: myzone.b-cdn.net）"
    )

    # ログ設定
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="ログレベル（DEBUG / INFO / WARNING / ERROR）"
    )

    # Pydantic v2の設定（Configクラスの代わりにmodel_configを使用）
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,  # Fieldのaliasとフィールド名の両方で読み込み可能
        extra="ignore"  # 未定義の環境変数を無視
    )


# グローバル設定インスタンス
settings = Settings()
