"""MySQL test server configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings


class MySQLConfig(BaseSettings):
    """Settings for the MySQL server started for tests.

    Connection overrides (TEST_MYSQL_HOST and friends) are not read here, see
    ``dockertest.services.mysql.options.load_mysql_options``.
    """

    image: str = Field(default="mysql", alias="test_mysql_image")
    image_tag: str = Field(default="5.7", alias="test_mysql_image_tag")
    driver: str = Field(default="mysql+mysqlconnector", alias="test_mysql_driver")
    container_port: str = Field(default="3306", alias="test_mysql_container_port")

    # Readiness polling
    ready_attempts: int = Field(default=10, ge=1, alias="test_mysql_ready_attempts")
    ready_delay: float = Field(default=3.0, ge=0, alias="test_mysql_ready_delay")

    class Config:
        env_prefix = ""
        extra = "ignore"
