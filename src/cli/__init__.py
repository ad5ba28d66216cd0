"""
どこで: `cli` パッケージ。
何を: colortuner のコマンドラインフロントエンド。
なぜ: エンジンを外部呼び出し側として利用する最小の入口を提供するため。
"""
