import gzip

import pytest

from dinuc_collapse import ReadRecord
from dinuc_collapse.io import FastAWriter, FastQReader, open_reads

FASTQ = (
    "@r1\n"
    "AGAGAGTT\n"
    "+\n"
    "IIIIIIII\n"
    "@r2\n"
    "ACGT\n"
    "+\n"
    "IIII\n"
)


def read_all(path):
    reader = FastQReader(path)
    records = [(record.header, record.sequence) for record in reader]
    return records, reader.summary


def test_reader_pairs_headers_with_next_line(tmp_path):
    path = tmp_path / "reads.fastq"
    path.write_text(FASTQ)
    records, summary = read_all(path)
    assert records == [("@r1", "AGAGAGTT"), ("@r2", "ACGT")]
    assert summary.headers == 2
    assert summary.records == 2
    assert summary.ignored_lines == 4
    assert summary.dropped_headers == 0


def test_reader_gzip(tmp_path):
    """Test that .gz input is decompressed transparently."""
    path = tmp_path / "reads.fastq.gz"
    with gzip.open(path, "wt") as handle:
        handle.write(FASTQ)
    records, _ = read_all(path)
    assert records == [("@r1", "AGAGAGTT"), ("@r2", "ACGT")]


def test_reader_multi_member_gzip(tmp_path):
    """Test that concatenated gzip members are read end to end."""
    path = tmp_path / "reads.fq.gz"
    path.write_bytes(
        gzip.compress(b"@r1\nACAC\n") + gzip.compress(b"@r2\nGGTT\n")
    )
    records, _ = read_all(path)
    assert records == [("@r1", "ACAC"), ("@r2", "GGTT")]


def test_reader_file_without_extension_is_plain_text(tmp_path):
    path = tmp_path / "reads"
    path.write_text("@r1\nACAC\n")
    records, _ = read_all(path)
    assert records == [("@r1", "ACAC")]


def test_reader_ignores_lines_before_first_header(tmp_path):
    path = tmp_path / "reads.fastq"
    path.write_text("ACGT\nTTTT\n@r1\nAGAG\n")
    records, summary = read_all(path)
    assert records == [("@r1", "AGAG")]
    assert summary.ignored_lines == 2


def test_reader_drops_header_without_sequence(tmp_path):
    """Test headers replaced by another header or left at end of file."""
    path = tmp_path / "reads.fastq"
    path.write_text("@r1\n@r2\nACAC\n@r3\n")
    records, summary = read_all(path)
    assert records == [("@r2", "ACAC")]
    assert summary.headers == 3
    assert summary.dropped_headers == 2


def test_reader_quality_line_starting_with_marker(tmp_path):
    """Test that a quality line that looks like a header is superseded."""
    path = tmp_path / "reads.fastq"
    path.write_text("@r1\nACAC\n+\n@@II\n@r2\nGGTT\n+\nIIII\n")
    records, summary = read_all(path)
    assert records == [("@r1", "ACAC"), ("@r2", "GGTT")]
    assert summary.dropped_headers == 1


def test_reader_handles_crlf(tmp_path):
    path = tmp_path / "reads.fastq"
    path.write_bytes(b"@r1\r\nAGAG\r\n")
    records, _ = read_all(path)
    assert records == [("@r1", "AGAG")]


def test_reader_keeps_empty_sequence_line(tmp_path):
    path = tmp_path / "reads.fastq"
    path.write_text("@r1\n\n")
    records, _ = read_all(path)
    assert records == [("@r1", "")]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_reads(tmp_path / "missing.fastq.gz")
    with pytest.raises(FileNotFoundError):
        list(FastQReader(tmp_path / "missing.fastq"))


def test_corrupt_gzip_is_fatal(tmp_path):
    path = tmp_path / "reads.fastq.gz"
    path.write_bytes(b"this is not gzip data\n")
    with pytest.raises(RuntimeError, match="Failed to read line 1"):
        list(FastQReader(path))


def test_truncated_gzip_is_fatal(tmp_path):
    path = tmp_path / "reads.fastq.gz"
    path.write_bytes(gzip.compress(FASTQ.encode("ascii"))[:-10])
    with pytest.raises(RuntimeError, match="Failed to read line"):
        list(FastQReader(path))


def test_undecodable_bytes_are_fatal(tmp_path):
    path = tmp_path / "reads.fastq"
    path.write_bytes(b"@r1\n\xff\xfe\n")
    with pytest.raises(RuntimeError, match="Failed to read line"):
        list(FastQReader(path))


def test_writer_to_file(tmp_path):
    path = tmp_path / "out" / "reads.fa"
    with FastAWriter(path) as writer:
        writer.write(ReadRecord(header="@r1", sequence="AG"), suffix="_dc")
        writer.write(ReadRecord(header="@r2", sequence="ACGT"))
    assert writer.written == 2
    assert path.read_text() == ">@r1_dc\nAG\n>@r2\nACGT\n"


def test_writer_to_stdout(capsys):
    with FastAWriter() as writer:
        writer.write(ReadRecord(header="@r1", sequence="GGTT"))
    assert capsys.readouterr().out == ">@r1\nGGTT\n"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
