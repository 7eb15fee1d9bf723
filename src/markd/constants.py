APP_NAME = "markd"
ENV_PREFIX = "MARKD_CONFIG__"
