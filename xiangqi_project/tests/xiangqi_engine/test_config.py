"""
测试配置管理和日志系统
"""

import json
import logging

import pytest
import yaml

from xiangqi_project.src.xiangqi_engine.config import (
    ConfigManager, GameConfig, SystemConfig, DEFAULT_GAME_CONFIG
)
from xiangqi_project.src.xiangqi_engine.rules_engine import ChessBoard, Color, Pos
from xiangqi_project.src.xiangqi_engine.utils import (
    setup_logger, setup_logger_from_config, get_logger, LoggerMixin, ConfigurationError
)


class TestConfigManager:
    """ConfigManager类的测试"""

    def test_creates_default_files(self, tmp_path):
        """测试初始化时创建默认配置文件"""
        manager = ConfigManager(str(tmp_path / "configs"))
        assert (tmp_path / "configs" / "game_config.yaml").exists()
        assert (tmp_path / "configs" / "system_config.yaml").exists()

        assert manager.get_game_config() == GameConfig()
        assert manager.get_system_config() == SystemConfig()

    def test_update_config(self, tmp_path):
        """测试更新并重新加载配置"""
        manager = ConfigManager(str(tmp_path))
        manager.update_config('game', first_player='black', unknown_key=1)

        config = ConfigManager(str(tmp_path)).get_game_config()
        assert config.first_player == 'black'
        assert not hasattr(config, 'unknown_key')
        assert DEFAULT_GAME_CONFIG.first_player == 'red'

        board = ChessBoard.from_config(config)
        assert board.current_player is Color.BLACK

    def test_reset_config(self, tmp_path):
        """测试重置配置"""
        manager = ConfigManager(str(tmp_path))
        manager.update_config('system', log_level='DEBUG')
        manager.reset_config('system')
        assert manager.get_system_config().log_level == 'INFO'

    def test_broken_file_falls_back_to_default(self, tmp_path):
        """测试配置文件损坏时使用默认配置"""
        manager = ConfigManager(str(tmp_path))
        (tmp_path / "game_config.yaml").write_text("first_player: [unclosed", encoding='utf-8')
        assert manager.get_game_config() == GameConfig()

        (tmp_path / "game_config.yaml").write_text("- just\n- a list\n", encoding='utf-8')
        assert manager.get_game_config() == GameConfig()

    def test_missing_file_falls_back_to_default(self, tmp_path):
        """测试配置文件缺失时使用默认配置"""
        manager = ConfigManager(str(tmp_path))
        (tmp_path / "game_config.yaml").unlink()
        assert manager.get_game_config() == GameConfig()

    def test_validate_config(self, tmp_path):
        """测试配置验证"""
        manager = ConfigManager(str(tmp_path))
        assert manager.validate_config('game')
        assert manager.validate_config('system')

        manager.update_config('game', first_player='green')
        assert not manager.validate_config('game')
        with pytest.raises(ConfigurationError):
            ChessBoard.from_config(manager.get_game_config())

        manager.update_config('system', log_level='LOUD')
        assert not manager.validate_config('system')

    def test_unknown_config_name(self, tmp_path):
        """测试未知的配置名称"""
        manager = ConfigManager(str(tmp_path))
        with pytest.raises(ConfigurationError):
            manager.save_config('mcts', GameConfig())
        with pytest.raises(ConfigurationError):
            manager.load_config('mcts', GameConfig)
        with pytest.raises(ConfigurationError):
            manager.update_config('mcts', first_player='black')
        with pytest.raises(ConfigurationError):
            manager.reset_config('mcts')
        with pytest.raises(ConfigurationError):
            manager.validate_config('mcts')

    def test_validate_first_player_with_spaces(self, tmp_path):
        """测试先手配置两侧的空白与大小写"""
        manager = ConfigManager(str(tmp_path))
        manager.update_config('game', first_player=' Black ')
        assert manager.validate_config('game')
        board = ChessBoard.from_config(manager.get_game_config())
        assert board.current_player is Color.BLACK

    def test_export_configs(self, tmp_path):
        """测试导出配置"""
        manager = ConfigManager(str(tmp_path / "configs"))

        json_path = tmp_path / "all.json"
        manager.export_configs(str(json_path))
        data = json.loads(json_path.read_text(encoding='utf-8'))
        assert data['game']['first_player'] == 'red'
        assert 'log_level' in data['system']

        yaml_path = tmp_path / "all.yaml"
        manager.export_configs(str(yaml_path))
        data = yaml.safe_load(yaml_path.read_text(encoding='utf-8'))
        assert set(data) == {'game', 'system'}


class TestLogger:
    """日志系统的测试"""

    def test_setup_logger_with_file(self, tmp_path):
        """测试同时输出到控制台和文件"""
        logger = setup_logger(
            name='xiangqi.test_file',
            level='DEBUG',
            log_file='test.log',
            log_dir=str(tmp_path / "logs"),
            console_output=False
        )
        logger.debug("走子 e6e5")
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / "logs" / "test.log"
        assert log_file.exists()
        assert "走子 e6e5" in log_file.read_text(encoding='utf-8')

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_setup_logger_is_idempotent(self):
        """测试重复设置不会添加多余的处理器"""
        logger = setup_logger(name='xiangqi.test_idempotent')
        count = len(logger.handlers)
        assert setup_logger(name='xiangqi.test_idempotent') is logger
        assert len(logger.handlers) == count

    def test_setup_from_config(self, tmp_path):
        """测试根据系统配置设置日志"""
        root = get_logger()
        saved = list(root.handlers)
        for handler in saved:
            root.removeHandler(handler)
        try:
            config = SystemConfig(log_level='WARNING', log_file='core.log',
                                  log_dir=str(tmp_path), console_output=False)
            logger = setup_logger_from_config(config)
            assert logger is root
            assert logger.level == logging.WARNING
            assert (tmp_path / "core.log").exists()
        finally:
            for handler in list(root.handlers):
                handler.close()
                root.removeHandler(handler)
            root.setLevel(logging.NOTSET)
            for handler in saved:
                root.addHandler(handler)

    def test_logger_mixin(self):
        """测试混入类的日志记录器名称"""
        assert ChessBoard().logger.name == 'xiangqi.ChessBoard'

        class Dummy(LoggerMixin):
            pass

        assert Dummy().logger.name == 'xiangqi.Dummy'

    def test_noop_is_logged(self, caplog):
        """测试空操作写入调试日志"""
        board = ChessBoard()
        with caplog.at_level(logging.DEBUG, logger='xiangqi'):
            assert board.move(Pos(4, 0), Pos(3, 0)) is None
        assert any("忽略走子" in record.getMessage() for record in caplog.records)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
