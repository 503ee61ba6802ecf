from importlib import reload


def test_public_api_available():
    import pdf2pngx

    reload(pdf2pngx)

    assert hasattr(pdf2pngx, "png"), "rasterizer submodule should be accessible via pdf2pngx"
    assert callable(pdf2pngx.convert)
    assert callable(pdf2pngx.convert_document)


def test_builtin_tools_registered():
    from pdf2pngx import registry

    assert "convert_png" in registry.names()
    assert "info" in registry.names()


def test_convert_document_wrapper(sample_pdf, tmp_path):
    from pdf2pngx import convert_document

    records = convert_document(sample_pdf, tmp_path / "wrapped", pages=[1], viewport_scale=0.5)

    assert records[0].name == "sample_page_1.png"
    assert (tmp_path / "wrapped" / "sample_page_1.png").is_file()


def test_convert_document_wrapper_with_buffer(sample_pdf_bytes):
    from pdf2pngx import convert_document

    records = convert_document(sample_pdf_bytes, output_file_mask="mem")

    assert [record.name for record in records] == ["mem_page_1.png", "mem_page_2.png", "mem_page_3.png"]
