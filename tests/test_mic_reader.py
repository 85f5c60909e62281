import numpy as np
import pytest

from flashgo.mic_reader import MicReader, SimMic


def _sine(bin_index):
    n = np.arange(512)
    return np.sin(2 * np.pi * bin_index * n / 512).astype(np.float32)


def test_constant_signal_has_no_bass():
    records = []
    reader = MicReader(SimMic(), log_data=lambda k, v: records.append((k, v)))
    reader.buffer = np.full(512, 3.0, dtype=np.float32)
    assert reader.analyze() == 0.0
    assert records == [("bass_volume", 0.0)]


def test_low_tone_has_more_bass_than_high_tone():
    low = MicReader(SimMic(), log_data=lambda k, v: None)
    low.buffer = _sine(2)
    high = MicReader(SimMic(), log_data=lambda k, v: None)
    high.buffer = _sine(50)
    low_volume = low.analyze()
    high_volume = high.analyze()
    assert low_volume > 1000
    assert high_volume < low_volume


def test_analyze_removes_mean():
    reader = MicReader(SimMic(), log_data=lambda k, v: None)
    reader.buffer = _sine(3) + np.float32(10.0)
    reader.analyze()
    assert abs(float(reader.buffer.mean())) < 1e-3


def test_analyze_rejects_wrong_size():
    reader = MicReader(SimMic(), log_data=lambda k, v: None)
    reader.buffer = np.zeros(10, dtype=np.float32)
    with pytest.raises(ValueError):
        reader.analyze()


@pytest.mark.asyncio
async def test_sim_mic_defaults_to_silence():
    samples = await SimMic().read_buffer(16, 8000)
    assert samples.tolist() == [0.0] * 16


@pytest.mark.asyncio
async def test_sim_mic_rejects_wrong_length():
    mic = SimMic(lambda size, rate: [0.0] * (size - 1))
    with pytest.raises(ValueError):
        await mic.read_buffer(8, 8000)


@pytest.mark.asyncio
async def test_read_buffer_process_reports_measurements():
    records = []
    requests = []

    def source(size, rate):
        requests.append((size, rate))
        return _sine(2)

    reader = MicReader(SimMic(source), log_data=lambda k, v: records.append((k, v)))
    volume = await reader.read_buffer_process()
    assert requests == [(512, 44100 // 4)]
    assert [key for key, _ in records] == ["bass_volume", "polling_frequency_hz"]
    assert records[0][1] == volume
    assert records[1][1] > 0